import string
from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from flat_paths.key_mapping import PathConfig, flatten, unflatten


_NAMES = st.text(alphabet=string.ascii_letters + "_-", min_size=1, max_size=8)
_LEAVES = (
    st.none()
    | st.booleans()
    | st.integers(min_value=-10_000, max_value=10_000)
    | st.text(max_size=20)
    | st.just([])
    | st.just({})
)
_NESTED = st.recursive(
    _LEAVES,
    lambda children: st.lists(children, min_size=1, max_size=4)
    | st.dictionaries(_NAMES, children, min_size=1, max_size=4),
    max_leaves=20,
)
_DOCUMENTS = st.dictionaries(_NAMES, _NESTED, max_size=5)

_CONFIGS = st.sampled_from(
    [
        PathConfig(),
        PathConfig(prefix="{", suffix="}", suffix_end=True),
        PathConfig(suffix="/", suffix_end=True, suffix_list_end=False),
        PathConfig(prefix_list="", suffix_list=""),
        PathConfig(prefix="<", suffix=">", prefix_list="(", suffix_list=")"),
    ]
)


def _count_leaves(value: Any) -> int:
    if isinstance(value, dict) and value:
        return sum(_count_leaves(child) for child in value.values())
    if isinstance(value, list) and value:
        return sum(_count_leaves(child) for child in value)
    return 1


@given(document=_DOCUMENTS, config=_CONFIGS)
def test_roundtrip_property(document: dict[str, Any], config: PathConfig) -> None:
    assert unflatten(flatten(document, config=config), config=config) == document


@given(document=_DOCUMENTS, config=_CONFIGS)
def test_roundtrip_with_start_property(document: dict[str, Any], config: PathConfig) -> None:
    flat = flatten(document, config=config, start="$")
    assert all(key.startswith("$") for key in flat)
    assert unflatten(flat, config=config, start="$") == document


@given(document=_DOCUMENTS, config=_CONFIGS)
def test_flatten_deterministic_property(document: dict[str, Any], config: PathConfig) -> None:
    assert list(flatten(document, config=config).items()) == list(flatten(document, config=config).items())


@given(document=_DOCUMENTS, config=_CONFIGS)
def test_flatten_paths_never_collide_property(document: dict[str, Any], config: PathConfig) -> None:
    assert len(flatten(document, config=config)) == (_count_leaves(document) if document else 0)


@given(items=st.lists(_NESTED, min_size=1, max_size=5))
def test_top_level_list_roundtrip_property(items: list[Any]) -> None:
    assert unflatten(flatten(items)) == items
