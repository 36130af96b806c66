from setuptools import setup, find_packages

setup(
    name="latex_table",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="A data model for generating LaTeX tables.",
    python_requires=">=3.7",
    install_requires=[],
    extras_require={
        "test": ["pytest", "mypy"],
    },
)
