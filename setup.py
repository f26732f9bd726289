# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

from pathlib import Path
from setuptools import setup, find_packages


def get_version():
    """Read __version__ from the package without importing it."""
    root = Path(__file__).parent.resolve()
    init = root / "src" / "csgdist" / "__init__.py"
    for line in init.read_text().splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip('"\'')
    raise RuntimeError("Unable to find __version__")


setup(
    name="csgdist",
    version=get_version(),
    description="Point-to-surface distances for CSG primitive surfaces",
    license="MPL-2.0",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "plot": ["matplotlib"],
        "test": ["pytest", "matplotlib"],
    },
)
