from ..identity import IdentityConfig


class MergeConfig:
    """Set of options to pass around while merging

    prune_trailing: when deleting missing records, also delete the base
        records sorting after the last incoming record. Disable to stop
        deleting at the end of the incoming sequence, keeping these.
    """

    def __init__(self, *, identity=None, prune_trailing=True):
        if identity is None:
            identity = IdentityConfig()
        self.identity = identity
        self.prune_trailing = prune_trailing

    def __copy__(self):
        return MergeConfig(
            identity=IdentityConfig(self.identity.key, self.identity.strict),
            prune_trailing=self.prune_trailing,
        )
