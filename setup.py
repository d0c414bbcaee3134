from setuptools import find_packages, setup

setup(
    name="dotgirl",
    version="0.2.0",
    description="dotgirl - keep dotfiles in one managed place and symlink them back",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # Command line interface (0.26+ vendors click, code uses click directly)
        "click",  # Used directly for CLI context and usage errors
        "rich",  # Terminal formatting and prompts
        "pydantic>=2",  # Models, config and serialization
        "pyyaml",  # YAML output display
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "dotgirl=dotgirl.cli:main",
        ],
    },
)
