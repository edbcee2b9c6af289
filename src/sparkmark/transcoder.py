"""Symbol transcoder for sparkmark.

Converts LaTeX-style equation source into a readable Unicode
approximation. This is not typesetting: it is one ordered pass of
substitutions over a fixed table.

Order of the pass:
1. Structures: fractions, roots
2. Super- and subscripts: single digits to Unicode glyphs, braced
   groups to ``^(...)`` / ``[...]``
3. Named symbols: Greek letters, operators, arrows, sets
4. Cleanup: any remaining backslash is dropped, so unknown macros
   pass through by name (``\\widehat{x}`` becomes ``widehat{x}``)

A braced group never contains a brace, which keeps every pattern linear
in the source length. Structures with nested groups are only partly
converted.

Named symbols only match whole macro names: ``\\in`` does not eat the
start of ``\\infty`` or ``\\int``.

Example:
    >>> transcode(r"\\frac{1}{2} + \\alpha^2")
    '(1)/(2) + α²'

Thread Safety:
The rule table is immutable; transcode is pure.

"""

import re
from collections.abc import Callable

_SUPERSCRIPTS = {
    "0": "⁰",
    "1": "¹",
    "2": "²",
    "3": "³",
    "4": "⁴",
    "5": "⁵",
    "6": "⁶",
    "7": "⁷",
    "8": "⁸",
    "9": "⁹",
    "n": "ⁿ",
}

_SUBSCRIPTS = {
    "0": "₀",
    "1": "₁",
    "2": "₂",
    "3": "₃",
    "4": "₄",
    "5": "₅",
    "6": "₆",
    "7": "₇",
    "8": "₈",
    "9": "₉",
}

SYMBOLS: dict[str, str] = {
    # Greek, lowercase
    "alpha": "α",
    "beta": "β",
    "gamma": "γ",
    "delta": "δ",
    "epsilon": "ε",
    "zeta": "ζ",
    "eta": "η",
    "theta": "θ",
    "kappa": "κ",
    "lambda": "λ",
    "mu": "μ",
    "nu": "ν",
    "xi": "ξ",
    "pi": "π",
    "rho": "ρ",
    "sigma": "σ",
    "tau": "τ",
    "phi": "φ",
    "chi": "χ",
    "psi": "ψ",
    "omega": "ω",
    # Greek, uppercase
    "Gamma": "Γ",
    "Delta": "Δ",
    "Theta": "Θ",
    "Lambda": "Λ",
    "Sigma": "Σ",
    "Pi": "Π",
    "Phi": "Φ",
    "Psi": "Ψ",
    "Omega": "Ω",
    # Operators and relations
    "pm": "±",
    "mp": "∓",
    "times": "×",
    "div": "÷",
    "cdot": "·",
    "neq": "≠",
    "ne": "≠",
    "leq": "≤",
    "le": "≤",
    "geq": "≥",
    "ge": "≥",
    "approx": "≈",
    "equiv": "≡",
    "sim": "∼",
    "propto": "∝",
    "infty": "∞",
    "partial": "∂",
    "nabla": "∇",
    # Arrows
    "rightarrow": "→",
    "to": "→",
    "leftarrow": "←",
    "leftrightarrow": "↔",
    "Rightarrow": "⇒",
    "Leftarrow": "⇐",
    "Leftrightarrow": "⇔",
    "mapsto": "↦",
    # Sets and logic
    "in": "∈",
    "notin": "∉",
    "subset": "⊂",
    "subseteq": "⊆",
    "supset": "⊃",
    "supseteq": "⊇",
    "cup": "∪",
    "cap": "∩",
    "emptyset": "∅",
    "forall": "∀",
    "exists": "∃",
    # Big operators and dots
    "sum": "Σ",
    "prod": "∏",
    "int": "∫",
    "ldots": "…",
    "cdots": "⋯",
}

_SYMBOL_PATTERN = re.compile(r"\\([A-Za-z]+)")


def _symbol(match: re.Match[str]) -> str:
    name = match.group(1)
    return SYMBOLS.get(name, match.group(0))


# (pattern, replacement) in application order
_RULES: tuple[tuple[re.Pattern[str], str | Callable[[re.Match[str]], str]], ...] = (
    (re.compile(r"\\frac\{([^{}]+)\}\{([^{}]+)\}"), r"(\1)/(\2)"),
    (re.compile(r"\\sqrt\[([^\[\]]+)\]\{([^{}]+)\}"), r"\1√(\2)"),
    (re.compile(r"\\sqrt\{([^{}]+)\}"), r"√(\1)"),
    (re.compile(r"\^([0-9n])"), lambda m: _SUPERSCRIPTS[m.group(1)]),
    (re.compile(r"_([0-9])"), lambda m: _SUBSCRIPTS[m.group(1)]),
    (re.compile(r"\^\{([^{}]+)\}"), r"^(\1)"),
    (re.compile(r"_\{([^{}]+)\}"), r"[\1]"),
    (_SYMBOL_PATTERN, _symbol),
    (re.compile(r"\\"), ""),
)


def transcode(latex: str) -> str:
    """Convert LaTeX-style source to a Unicode approximation.

    Never raises; unknown macros lose their backslash and are otherwise
    left as written.

    Args:
        latex: Equation source between the delimiters

    Returns:
        Unicode approximation of ``latex``
    """
    result = latex
    for pattern, replacement in _RULES:
        result = pattern.sub(replacement, result)
    return result
