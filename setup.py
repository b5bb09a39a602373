from setuptools import setup, find_packages

with open("README.md") as f:
    readme = f.read()

setup(
    name="ppa",
    version="0.1.0",
    description=("ppa reads tabular point coordinates into point "
                 "collections for point pattern analysis"),
    long_description=readme,
    long_description_content_type="text/markdown",
    classifiers=['Topic :: Scientific/Engineering :: GIS',
                 'Intended Audience :: Science/Research',
                 'Operating System :: OS Independent',
                 'Programming Language :: Python :: 3'],
    keywords='point pattern analysis',
    packages=find_packages(exclude=["*tests*", "*examples*"]),
    python_requires=">=3.8",
    install_requires=[
        'numpy',
        'pandas',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['ppa=ppa.cli:main'],
    },
)
