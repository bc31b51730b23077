from setuptools import setup, find_packages

setup(
    name="argsy",
    version="0.1.0",
    description="Declare, parse and validate command line options with typed lookups.",
    long_description=open("README.md", encoding="UTF-8").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["argsy", "argsy.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "prompt_toolkit",
        "pydantic>=2",
        "python-dateutil",
        "python-json-logger>=3.1",
        "PyYAML",
        "toml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["argsy=argsy.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
