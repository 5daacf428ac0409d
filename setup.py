from setuptools import setup
from setuptools import find_packages

PACKAGE_NAME = "circulist"
VERSION_MINOR = 1
VERSION_MAJOR = 0

# with open("readme.md") as f:
#     long_descr = f.read()

setup(
    name=PACKAGE_NAME,
    version=f"{VERSION_MAJOR}.{VERSION_MINOR}",
    packages=find_packages(
        where="src",
    ),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "pydantic",
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    author="Stepan Dyatkovskiy",
    author_email="ml@dyatkovskiy.com",
    description="Circular sequence with a movable cursor, built as an immutable zipper.",
    license="GPL3",
    keywords="python circular list zipper cursor",
)
