from setuptools import setup, find_packages

setup(
    name="tftsketch",
    version="0.1.0",
    description="Un mini-éditeur d'écrans TFT qui génère le code TFT_eSPI en PyQt5",
    author="Vous",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt5>=5.15"
    ],
    extras_require={
        "test": ["pytest>=7"]
    },
    entry_points={
        "gui_scripts": [
            "tftsketch = tftsketch.__main__:main"
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Framework :: PyQt5"
    ],
)
