from setuptools import setup, find_packages

setup(
    name="vecthrust",
    version="0.1.0",
    description="Immutable n-dimensional geometric vectors with elementwise arithmetic",
    author="Vecthrust Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "jsonschema>=4.0.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.2.5",
            "black>=21.6b0",
            "isort>=5.9.2",
            "mypy>=0.910",
        ],
    },
    entry_points={
        "console_scripts": [
            "vecthrust=vecthrust.vecthrust:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
    ],
    python_requires=">=3.8",
)
