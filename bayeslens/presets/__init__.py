"""
Preset registry.

Four fixed catalogs keyed by (state space, kind); lookup by family tag.
"""

from bayeslens.exceptions import UnknownPresetError
from bayeslens.presets.continuous import (
    CONTINUOUS_LIKELIHOOD_PRESETS,
    CONTINUOUS_PRIOR_PRESETS,
)
from bayeslens.presets.discrete import (
    DISCRETE_LIKELIHOOD_PRESETS,
    DISCRETE_PRIOR_PRESETS,
)
from bayeslens.presets.schema import (
    ParamDef,
    Preset,
    PresetFamily,
    PresetKind,
    StateSpace,
)

CATALOGS: dict[tuple[StateSpace, PresetKind], tuple[Preset, ...]] = {
    (StateSpace.CONTINUOUS, PresetKind.PRIOR): CONTINUOUS_PRIOR_PRESETS,
    (StateSpace.CONTINUOUS, PresetKind.LIKELIHOOD): CONTINUOUS_LIKELIHOOD_PRESETS,
    (StateSpace.DISCRETE, PresetKind.PRIOR): DISCRETE_PRIOR_PRESETS,
    (StateSpace.DISCRETE, PresetKind.LIKELIHOOD): DISCRETE_LIKELIHOOD_PRESETS,
}


def list_presets(space: StateSpace, kind: PresetKind) -> tuple[Preset, ...]:
    """Catalog for one (space, kind), in display order."""
    return CATALOGS[(StateSpace(space), PresetKind(kind))]


def get_preset(space: StateSpace, kind: PresetKind, family: str) -> Preset:
    """Look up a preset by family tag; raises UnknownPresetError."""
    space, kind = StateSpace(space), PresetKind(kind)
    tag = family.value if isinstance(family, PresetFamily) else str(family)
    for preset in CATALOGS[(space, kind)]:
        if preset.family.value == tag:
            return preset
    raise UnknownPresetError(space.value, kind.value, tag)


__all__ = [
    "CATALOGS",
    "ParamDef",
    "Preset",
    "PresetFamily",
    "PresetKind",
    "StateSpace",
    "get_preset",
    "list_presets",
]
