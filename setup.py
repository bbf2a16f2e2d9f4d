import setuptools

with open("README.md", "r") as file:
    long_description = file.read()

with open("VERSION", "r") as file:
    version = file.read().strip()

setuptools.setup(
    name="urlplate",
    version=version,
    author="NRSER",
    author_email="neil@nrser.com",
    description="Build parameterized URL templates and render them to strings",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["urlplate", "urlplate.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    install_requires=[
        'typeguard>=4,<5',
        'rich>=10',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
