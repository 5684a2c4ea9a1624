# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="rotalog",
    version="1.0.0",
    description="Delimited log files with size-based rotation and archive retention",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["rotalog*"]),  # Incluye subpaquetes sin __init__.py
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'rotalog=rotalog.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
