"""Install the AMO user account store."""

from setuptools import setup, find_packages

setup(
    name='amo-users',
    version='0.1.0',
    packages=[f'amo.{package}' for package
              in find_packages('./amo', exclude=['*test*'])],
    install_requires=[
        "python-json-logger",
    ],
    extras_require={
        'test': [
            "pytest",
            "mimesis",
        ]
    },
    python_requires='>=3.8',
    zip_safe=False
)
