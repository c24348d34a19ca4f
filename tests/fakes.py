LAN_ADDRESS = "100.100.1.100"
MACHINE_HOSTNAME = "dev-machine.local"


class FakeNetwork:
    """Network collaborator returning fixed values and counting lookups."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def discover_lan_address(self) -> str:
        self.calls.append("lan_address")
        return LAN_ADDRESS

    def discover_hostname(self) -> str:
        self.calls.append("hostname")
        return MACHINE_HOSTNAME
