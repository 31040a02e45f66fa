"""
Special Functions and Closed-Form Densities.

- ln_gamma: Lanczos approximation (g = 7, 9 coefficients)
- beta_pdf: Beta density on the open interval (0, 1)
- gaussian_pdf / gaussian_bump: normalized and peak-1 Gaussians
- uniform_pdf, bimodal_pdf

All functions are scalar; generators map them over a grid.
"""

import math

# ── Lanczos configuration ─────────────────────────────────────────────────

LANCZOS_G: int = 7
LANCZOS_COEFFICIENTS: tuple[float, ...] = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

SQRT_2PI: float = math.sqrt(2 * math.pi)


def ln_gamma(z: float) -> float:
    """
    Log-gamma via the Lanczos approximation.

    For z < 0.5 uses the reflection formula
    ln Γ(z) = ln(π / sin(πz)) − ln Γ(1 − z).
    """
    if z < 0.5:
        return math.log(math.pi / math.sin(math.pi * z)) - ln_gamma(1 - z)

    z -= 1
    x = LANCZOS_COEFFICIENTS[0]
    for i in range(1, LANCZOS_G + 2):
        x += LANCZOS_COEFFICIENTS[i] / (z + i)
    t = z + LANCZOS_G + 0.5
    return 0.5 * math.log(2 * math.pi) + (z + 0.5) * math.log(t) - t + math.log(x)


def ln_beta(alpha: float, beta: float) -> float:
    """ln B(α, β) = ln Γ(α) + ln Γ(β) − ln Γ(α + β)."""
    return ln_gamma(alpha) + ln_gamma(beta) - ln_gamma(alpha + beta)


def beta_pdf(x: float, alpha: float, beta: float) -> float:
    """Beta(α, β) density; exactly 0 outside the open interval (0, 1)."""
    if x <= 0 or x >= 1:
        return 0.0
    return math.exp(
        (alpha - 1) * math.log(x) + (beta - 1) * math.log(1 - x) - ln_beta(alpha, beta)
    )


def gaussian_pdf(x: float, mu: float, sigma: float) -> float:
    z = (x - mu) / sigma
    return math.exp(-0.5 * z * z) / (sigma * SQRT_2PI)


def gaussian_bump(x: float, center: float, width: float) -> float:
    """Unnormalized Gaussian with peak value 1 at the center."""
    z = (x - center) / width
    return math.exp(-0.5 * z * z)


def uniform_pdf(x: float, a: float, b: float) -> float:
    return 1 / (b - a) if a <= x <= b else 0.0


def bimodal_pdf(x: float, mu1: float, mu2: float, sigma: float, weight: float) -> float:
    """Equal-width two-component Gaussian mixture, weight on the first component."""
    return weight * gaussian_pdf(x, mu1, sigma) + (1 - weight) * gaussian_pdf(x, mu2, sigma)
