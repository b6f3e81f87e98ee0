from setuptools import setup, find_packages


setup(
    name='math3',
    version='1.0.0',
    description='Immutable 3 element vectors and 3x3 matrices for rotations and spatial transforms',
    packages=find_packages(include=['math3', 'math3.*']),
    python_requires='>=3.10',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
