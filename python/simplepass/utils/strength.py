"""
Qualitative strength labels for entropy estimates.
"""

from typing import List, Tuple

VERY_WEAK = "Very weak"
WEAK = "Weak"
AVERAGE = "Average"
STRONG = "Strong"
VERY_STRONG = "Very strong"

# (exclusive upper bound in bits, label), checked in order
STRENGTH_THRESHOLDS: List[Tuple[float, str]] = [
    (8, VERY_WEAK),
    (16, WEAK),
    (32, AVERAGE),
    (64, STRONG),
]


def classify_strength(entropy_bits: float) -> str:
    """
    Map an entropy estimate to a strength label.

    Args:
        entropy_bits: Value returned by ``count_entropy_bits``

    Returns:
        One of the labels above
    """
    for upper_bound, label in STRENGTH_THRESHOLDS:
        if entropy_bits < upper_bound:
            return label

    return VERY_STRONG
