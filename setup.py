"""Setup script for the Dev Center registration client."""

from pathlib import Path

from setuptools import find_packages, setup


def read_long_description():
    """Use the README when building from a full source checkout."""
    readme = Path(__file__).parent / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="devcenter-register",
    version="0.1.0",
    description="Register CI branches and commits with the Dev Center",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(include=["devcenter", "devcenter.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "dependency-injector>=4.41",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "devcenter=devcenter.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Environment :: Console",
    ],
)
