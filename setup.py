from setuptools import setup, find_packages

# Use find_packages to automatically discover all packages
packages = find_packages(include=["poissimple", "poissimple.*"])

setup(
    name="poissimple",
    version="0.1.0",
    description="Naive Poisson-disk sampling of a fixed number of points in n dimensions",
    packages=packages,
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pandas",
        "scipy",
        "matplotlib",
        "tqdm",
        "pyyaml",
        "typer",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "poissimple-generate=poissimple.cli.generate:app",
        ],
    },
)
