"""
Setup script for the trivia-engine package.

The private subpackages (_difficulty, _scoring, _session, _shared) hold
the engine internals; the public API (runner.py, question_source.py,
types.py, errors.py) is re-exported from trivia_engine/__init__.py.
"""

from setuptools import setup, find_packages

setup(
    name="trivia-engine",
    version="1.0.0",
    description="Trivia session engine - difficulty classification, scoring and game modes",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "trivia-engine=trivia_engine.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
