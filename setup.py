from setuptools import setup, find_packages

setup(
    name="termbar",
    version="0.1.0",
    packages=find_packages(include=["termbar", "termbar.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "termbar=termbar.cli:main",
        ],
    },
    python_requires=">=3.10",
    author="Max Carlson",
    author_email="carlsonamax@gmail.com",
    description="tqdm-style progress lines for any iteration range",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
