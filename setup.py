"""
fixpoint: Anonymous Recursion via the Applicative-Order Y-Combinator

Derives recursive functions from generators that describe a single step
of the recursion, using self-application delayed by eta-expansion so it
terminates under Python's eager evaluation.
"""

from setuptools import setup, find_packages

setup(
    name="fixpoint",
    version="1.0.0",
    description="Applicative-order Y-combinator for anonymous recursion in Python",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "benchmarks"]),
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
    ],
)
