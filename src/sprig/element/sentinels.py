__all__ = ["ABSENT"]


class ABSENT:
    """Fills a Bunch slot whose member had nothing to give back (no parent, no
    next sibling...), so that broadcast results keep their positions.

    Replaces a plain None, which a Bunch drops on construction.
    """
