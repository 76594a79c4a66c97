from setuptools import setup, find_packages

setup(
    name="exactmatrix",
    version="1.0",
    description="Dense matrix arithmetic on exact rational values",
    long_description=("Dense matrix arithmetic on exact rational values: reduced row echelon form by "
                      "Gauss-Jordan elimination, matrix arithmetic, determinant, inverse and linear independence"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["exactmatrix", "exactmatrix.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["matrix", "linear algebra", "rational arithmetic", "gaussian elimination"],
    zip_safe=False,
)
