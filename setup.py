from setuptools import setup, find_packages
import retrack


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='retrack',
    description="Backtracking regular expression matcher implemented in pure Python",
    long_description=long_description,
    version=retrack.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    extras_require={
        'test': ['pytest', 'hypothesis', 'lark'],
    },
    entry_points={
        'console_scripts': [
            'retrack-match = retrack.cli.match:match',
            'retrack-parse = retrack.cli.parse:parse',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
    ]
)
