"""Verify package imports work correctly."""


def test_import_migas() -> None:
    """Test that migas can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import migas

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert migas.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from migas import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Everything in __all__ is importable from the package root."""
    import migas

    for name in migas.__all__:
        assert hasattr(migas, name), name
