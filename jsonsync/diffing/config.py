from ..identity import IdentityConfig


class DiffConfig:
    """Set of options to pass around while computing a difference"""

    def __init__(self, *, identity=None):
        if identity is None:
            identity = IdentityConfig()
        self.identity = identity

    def __copy__(self):
        return DiffConfig(
            identity=IdentityConfig(self.identity.key, self.identity.strict),
        )
