from setuptools import setup, find_packages

setup(
    name='blc',
    version='0.1.0',
    description='BL language parser and pretty-printer',
    author='jose',
    packages=['blc'],
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'blc=blc.main:main',
        ],
    },
)
