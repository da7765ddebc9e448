# setup.py
from setuptools import setup, find_packages

setup(
    name="treescaffold",
    version="1.0.0",
    description="Create directory and file hierarchies from textual tree listings",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={
        "treescaffold": ["interface/locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treescaffold=treescaffold.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
