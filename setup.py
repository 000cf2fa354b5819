"""
Setup script for conefrustum.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[test]"   # With test dependencies

Profiling markers can be compiled out at runtime with
CONEFRUSTUM_NO_PROFILING=1 (see conefrustum.profiling).
"""

from setuptools import setup, find_packages


setup(
    name='conefrustum',
    version='0.1.0',
    description='Cone frustum primitive with exact ray / lateral surface intersection',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
