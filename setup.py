from setuptools import find_packages, setup

setup(
    name="ratingdata",
    version="0.1.0",
    description="Rating data storage with lazily-built user and item indexes",
    license="MIT",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "numpy>=1.26",
        "pandas>=2.0",
        "pydantic>=2.8",
        "pydantic-settings>=2.4",
        "structlog>=23.2",
        "typing-extensions>=4.12",
    ],
    extras_require={
        "test": [
            "pytest>=8",
            "hypothesis>=6.60",
        ],
        "dev": [
            "nox",
        ],
    },
)
