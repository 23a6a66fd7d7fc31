"""Package build script"""
import re
import setuptools

ver_file = 'VERSION'

# Pull package version number from the VERSION file
with open(ver_file, 'r', encoding='utf-8') as f:
    verstr = re.match(r'^\s*(v?\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?)\s*$', f.read())
    if verstr is None:
        raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

    __version__ = verstr.groups()[0]

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geoprojections",
    version=__version__,
    author="Carl Best",
    author_email="",
    description="Map projections of geographic coordinates onto a plane, and back.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    url="https://github.com/ccbest/geoprojections",
    packages=setuptools.find_packages(
        include=('geoprojections*', ),
        exclude=('*tests', 'tests*')
    ),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.20',
        'pydantic>=2,<3',
        'typing_extensions>=4',
        'geographiclib>=2,<3',
    ],
    extras_require={
        'test': [
            'pytest',
            'pyproj>=3',
        ],
    },
)
