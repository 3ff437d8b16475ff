"""
Setup script for sudachikit package.

sudachikit is a small Python facade over the SudachiPy Japanese
morphological analyzer with serializable results and dictionary
download metadata.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="sudachikit",
    version="0.1.0",
    author="Noyu Ritsuji",
    author_email="",
    description="A stable facade over the SudachiPy Japanese morphological analyzer",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/noyuri2z/sudachikit",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
        "Natural Language :: Japanese",
        "Natural Language :: English",
    ],
    python_requires=">=3.8",
    install_requires=[
        "sudachipy>=0.6.8",
    ],
    extras_require={
        "core": [
            "sudachidict_core>=20220729",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "sudachidict_core>=20220729",
            "black>=21.0",
            "flake8>=3.9",
            "mypy>=0.900",
        ],
    },
    keywords=[
        "sudachi",
        "sudachipy",
        "morphological analysis",
        "tokenizer",
        "nlp",
        "japanese",
    ],
)
