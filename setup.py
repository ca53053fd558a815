from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="addresscountry",
    version="0.0.1",
    author="Peter Cotton",
    author_email="",
    description="Country extraction from free-text addresses via geocoding",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/petercotton/addresscountry",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3.0",
        "pycountry>=22.0.0",
        "requests>=2.25.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
