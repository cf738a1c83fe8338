from setuptools import setup, find_packages

setup(
    name="lyrics-resolver",
    version="0.1.0",
    description="Find lyrics for noisy track/artist pairs taken from video titles by cascading over several free lyrics APIs",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    license="MIT",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"lyrics_resolver": ["py.typed"]},
    install_requires=[
        "colorama>=0.4.6",
        "requests",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "ruff",
            "mypy",
        ]
    },
    entry_points={
        "console_scripts": [
            "lyrics-resolver=lyrics_resolver.cli:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio",
        "Topic :: Utilities",
    ],
    keywords="lyrics youtube music lookup fallback",
)
