"""
Custom setup.py to exclude pygame-dependent files from the wheel.

viewer.py and __main__.py need pygame / Pillow, which the simulation core
does not. They are only needed for local interactive use; install the
"viewer" extra and run from a source checkout for that.
"""

from setuptools import find_packages, setup
from setuptools.command.build_py import build_py as _build_py


# Files that require pygame and should not be packaged in the wheel.
_EXCLUDE_MODULES = {"viewer", "__main__"}


class BuildPy(_build_py):
    """Custom build_py that excludes pygame-dependent modules."""

    def find_package_modules(self, package, package_dir):
        modules = super().find_package_modules(package, package_dir)
        return [
            (pkg, mod, path)
            for (pkg, mod, path) in modules
            if mod not in _EXCLUDE_MODULES
        ]


setup(
    name="reaction-diffusion",
    version="0.1.0",
    description="Gray-Scott reaction-diffusion simulator rendering to ARGB pixel buffers",
    python_requires=">=3.9",
    packages=find_packages(include=["reaction_diffusion", "reaction_diffusion.*"]),
    install_requires=["numpy>=1.22"],
    extras_require={
        "viewer": ["pygame>=2.1", "Pillow>=9.0"],
        "test": ["pytest>=7"],
    },
    cmdclass={"build_py": BuildPy},
)
