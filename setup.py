# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="lottie-keypath",
    version="0.1.0",
    description="Dump the KeyPath tree of Lottie animations, expanding pre-composition references",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["lottie_keypath*"]),
    python_requires=">=3.9",
    install_requires=[
        "customtkinter",  # GUI viewer
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'lottie-keypath=lottie_keypath.interface.cli.app:main',
        ],
        'gui_scripts': [
            'lottie-keypath-gui=lottie_keypath.interface.gui.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
