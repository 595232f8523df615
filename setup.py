import setuptools

# Long description and versioning code copied with modifications from
# <https://github.com/blackjax-devs/blackjax/blob/main/setup.py>

with open("README.md") as f:
    long_description = f.read()


def get_version(path):
    """Get the package's version number.
    We fetch the version  number from the `__version__` variable located in the
    package root's `__init__.py` file. This way there is only a single source
    of truth for the package's version number.
    """
    with open(path) as f:
        for line in f:
            if line.startswith("__version__"):
                delim = '"' if '"' in line else "'"
                return line.split(delim)[1]
        else:
            raise RuntimeError("Unable to find version string.")


setuptools.setup(
    name="adjgraph",
    version=get_version("src/adjgraph/__init__.py"),
    long_description=long_description,
    description="In-memory adjacency-list graph with typed vertex properties",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
        "tqdm>=4",
    ],
    extras_require={"test": ["pytest>=7"]},
    zip_safe=False,
    long_description_content_type="text/markdown",
)
