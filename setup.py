"""Package build script"""
import re
import setuptools

ver_file = 'VERSION'

# Pull package version number from the VERSION file
with open(ver_file, 'r') as f:
    verstr = re.match(r'^\s*v?(\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?)\s*$', f.read())
    if verstr is None:
        raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

    __version__ = verstr.groups()[0]

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="atseptools",
    version=__version__,
    author="ATSEP Toolbox",
    author_email="",
    description="Vincenty geodesics on WGS-84 and ICAO standard atmosphere QNH corrections.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('atseptools*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"atseptools": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.21',
        'pydantic>=2.0,<3.0',
    ],
    extras_require={
        'test': [
            'geographiclib>=2.0',
            'pytest>=7.0',
        ],
    },
)
