"""Selection of a rustup toolchain directory name."""

STABLE_PREFIX = "stable-"
NIGHTLY_PREFIX = "nightly-"


def pick_toolchain(
    names: list[str],
    *,
    stable_prefix: str = STABLE_PREFIX,
    nightly_prefix: str = NIGHTLY_PREFIX,
) -> str | None:
    """Pick a toolchain from directory names given in enumeration order.

    The first stable toolchain wins. Without one, the last nightly
    toolchain listed is used.
    """
    for name in names:
        if name.startswith(stable_prefix):
            return name
    nightly = None
    for name in names:
        if name.startswith(nightly_prefix):
            nightly = name
    return nightly
