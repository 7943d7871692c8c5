from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="SeqOps",
    version=version,
    description="Lazy operators over sequences: windows, sections, slices and more",
    long_description=long_description,
    keywords=['sequence', 'lazy', 'iterator', 'window', 'slice'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(include=["seqops", "seqops.*"]),
    install_requires=[
        'tblib'],
    extras_require={
        'tests': [
            'pytest', 'pytest-timeout', 'numpy', 'coverage']
    }
)
