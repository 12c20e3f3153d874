"""
Exceptions raised along the entropy pipeline

© 2023-2025 Infant Neuromotor Control Laboratory. All rights reserved.
"""


class ShapeMismatchError(ValueError):
    """ Band inputs (or m/tau vectors) do not agree in shape """
    pass


class InvalidParameterError(ValueError):
    """ Non-positive or non-integer m, tau, or scale """
    pass


class InsufficientSamplesError(ValueError):
    """
    Fewer than two embedded vectors are left, so no distance pair
    (and no permutation distribution) can be formed.

    Attributes
    ----------
    n_vectors : int
        Number of embedded vectors that were available.
    scale : int | None
        Coarse-graining scale at which it happened (None if single-scale).
    """
    def __init__(self, n_vectors, scale=None):
        self.n_vectors = n_vectors
        self.scale = scale
        msg = f"Only {n_vectors} embedded vector(s) available; at least 2 needed"
        if scale is not None:
            msg += f" (scale {scale})"
        super().__init__(msg)


class ComputationCancelled(Exception):
    """
    Raised between scales when the caller's cancel event is set.
    `profile` holds the entropy values computed so far.
    """
    def __init__(self, profile):
        self.profile = profile
        super().__init__(
                f"Cancelled after {len(profile)} scale(s)")
