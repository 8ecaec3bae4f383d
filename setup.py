from setuptools import setup, find_packages

setup(
    name="randomfile",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "randomfile = randomfile.cli:main",
        ]
    },
)
