from setuptools import setup, find_packages

setup(
    name="cellarbook",
    version="0.1.0",
    description="Cellarbook - a small wine catalog with storage and aging recommendations.",
    author="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.4.0",
        "pandas>=2.0.0",
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
