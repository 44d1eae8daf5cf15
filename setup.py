# pylint:disable=all
"""
Release check list:
1. Change the version in firstaid/__init__.py and setup.py.
2. Commit these changes with the message: "Release: VERSION"
3. Add a tag in git to mark the release: "git tag VERSION -m"Adds tag VERSION for pypi" "
   Push the tag to git: git push --tags origin master
4. Build both the sources and the wheel: "python setup.py sdist bdist_wheel".
5. Check that everything looks correct by uploading the package to the pypi test server:
   twine upload dist/* -r pypitest
   Check that you can install it in a virtualenv by running:
   pip install -i https://testpypi.python.org/pypi firstaid
6. Upload the final version to actual pypi:
   twine upload dist/* -r pypi
"""
from io import open
from setuptools import find_packages, setup

setup(
    name="firstaid",
    version="0.1.0",
    description="Turn an accepted correction for a multi-line span into single-line edits.",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    keywords="spellcheck proofreading text edits patch",
    license="Apache",
    packages=find_packages(exclude=["*.tests", "*.tests.*",
                                    "tests.*", "tests"]),
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=[],
    tests_require=["pytest"],
    extras_require={"test": ["pytest"]},
    classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: Apache Software License",
          "Programming Language :: Python :: 3",
          "Topic :: Text Processing :: Linguistic",
    ],
)
