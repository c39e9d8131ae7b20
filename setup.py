from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()
with open("tagparse/semver.txt", encoding="utf-8") as fh:
    semver = fh.read().strip()
with open("requirements.txt", encoding="utf-8") as fh:
    install_requires = [x.strip() for x in fh.read().strip().split("\n") if len(x) and x[0].isalpha()]

setup(
    name="tagparse",
    version=semver,
    description="A small parser-combinator engine, and a start-tag grammar built from it.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"tagparse": ["py.typed", "semver.txt"]},
    include_package_data=True,
    install_requires=install_requires,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: Public Domain",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Topic :: Software Development :: Libraries",
        "Topic :: Text Processing :: Markup",
    ],
    entry_points={"console_scripts": ["tagparse = tagparse:main"]},
)
