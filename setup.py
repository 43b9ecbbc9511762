import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("limbnum/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="limbnum",
    version=version,
    author="Bob Stein",
    author_email="bob.stein@qiki.info",
    description="Arbitrary-precision signed integers on 30-bit limbs. Truncating division. Exact float comparison.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/BobStein/limbnum",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.6',
    extras_require={
        'test': [
            'hypothesis',
            'pytest',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries",
    ],
)
