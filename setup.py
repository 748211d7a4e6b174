from setuptools import setup

setup(
    name="pokeTest",
    version="1.0.0",
    packages=["src"],
    python_requires=">=3.9",
    install_requires=[
        "requests>=2.28",
        "PyYAML>=6.0",
        "jsonpath-ng>=1.5.3",
        "Jinja2>=3.0",
        "click>=8.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "pokeTest=src.suite:main_cli",
        ],
    },
)
