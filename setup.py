import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='geopoint',
    version='0.0.1',
    author='GeoPoint Developers',
    description='2D geographic points with quadkey and geohash codecs',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: OS Independent',
        'Topic :: Scientific/Engineering :: GIS',
        'Intended Audience :: Science/Research'
    ],
    python_requires='>=3.8',
    install_requires=[
        'setuptools',
        'numpy',
        'shapely>=2.0'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'geopoint=geopoint.cli.__main__:main'
        ]
    }
)
