# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fsreplay",
    version="1.0.0",
    description="Rebuild a directory tree from a cd/ls terminal transcript and query its sizes",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fsreplay", "fsreplay.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'fsreplay=fsreplay.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
