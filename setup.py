"""pysmarts: SMARTS substructure-query parser. """

from setuptools import find_packages, setup

#####################################
VERSION = "0.1.0"
ISRELEASED = True
if ISRELEASED:
    __version__ = VERSION
else:
    __version__ = VERSION + ".dev0"
#####################################


setup(
    name="pysmarts",
    version=__version__,
    description=__doc__.split("\n")[0],
    long_description=__doc__,
    packages=find_packages(),
    package_dir={"pysmarts": "pysmarts"},
    install_requires=["lark>=1.1", "networkx"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.7",
    include_package_data=True,
    license="MIT",
    zip_safe=False,
    keywords="pysmarts smarts cheminformatics parser",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX",
        "Operating System :: Unix",
        "Operating System :: MacOS",
    ],
)
