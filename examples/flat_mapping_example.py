"""Minimal example for flattening, unflattening and FlatMapping."""

from flat_paths import FlatMapping, PathConfig, flatten, unflatten


def main() -> None:
    """Flatten a document with braced keys and rebuild it."""
    config = PathConfig(prefix="{", suffix="}", suffix_end=True)
    document = {"assokey": ["Foo"], "user": {"alice": {"age": 30}}}

    flat = flatten(document, config=config, start="$")
    print("flat:", flat)
    print("nested:", unflatten(flat, config=config, start="$"))

    mapping = FlatMapping()
    mapping.merge_nested({"user": {"alice": {"age": 30}}})
    mapping.merge_nested({"user": {"bob": {"roles": ["admin"]}}})
    print(f"{mapping=}")
    print("to_nested:", mapping.to_nested())


if __name__ == "__main__":
    main()
