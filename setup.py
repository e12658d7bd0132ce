"""
Setup script for spatialrel.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[dev]"    # With dev dependencies

The package is pure Python; numpy is only needed for the vectorised
point containment helpers on Rectangle.
"""

from setuptools import setup, find_packages


setup(
    name='spatialrel',
    version='0.1.0',
    description='Rectangle/point spatial relations on planar and geodetic surfaces',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
    ],
    extras_require={
        'dev': ['pytest'],
    },
)
