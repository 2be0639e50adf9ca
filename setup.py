from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "typing-extensions>=4.4.0"
]

# Optional test dependencies
test_requirements = [
    "pytest>=7.0.0"
]

setup(
    name="svg_builder",
    version="0.1.0",
    description="An in-memory builder for SVG documents with chained shape styling",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
