from setuptools import setup, find_packages
import os

this_directory = os.path.abspath(os.path.dirname(__file__))


def readme():
    with open(os.path.join(this_directory, 'README.rst'), encoding='utf-8') as f:
        return f.read()


setup(
    name='fixint',
    version='0.1.0',
    description='Fixed width unsigned integers with exact integer roots',
    long_description=readme(),
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.9.0',
    keywords='fixed width integer uint root newton',
    install_requires=['attrs', 'stopit'],
    packages=find_packages(exclude=['tests*', 'docs']),
    extras_require={
        'pytest': ['pytest', 'pytest-xdist', 'hypothesis'],
        'yaml': ['pyyaml'],
    },
    entry_points={
        'console_scripts': [
            'fixint = fixint.entry:main',
        ],
    },
)
