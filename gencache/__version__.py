"""
Version of the generational-cache distribution.

Resolved from installed package metadata; a source checkout that was never
installed falls back to the ``[project] version`` in pyproject.toml.
"""

try:
    from importlib.metadata import version

    __version__ = version("generational-cache")
except Exception:
    # Not installed: read pyproject.toml next to the package
    import tomllib
    from pathlib import Path

    try:
        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except Exception:
        __version__ = "0.0.0-dev"
