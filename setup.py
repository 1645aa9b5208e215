from setuptools import setup, find_packages

setup(
    name="seqprover",
    version="0.1.0",
    description="Propositional sequent calculus prover with derivation trees",
    author="seqprover Contributors",
    author_email="",

    # Find packages in the src/ directory
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"seqprover": ["configs/*.yaml"]},

    zip_safe=False,
    python_requires=">=3.8",

    install_requires=[
        "pyyaml",
        "tqdm",
    ],

    extras_require={
        "test": [
            "pytest>=6.0",
            "pytest-cov",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "mypy",
            "types-PyYAML",
            "ruff",
        ],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
    ],

    entry_points={
        "console_scripts": [
            "seqprover=seqprover.cli.prove:main",
        ],
    },
)
