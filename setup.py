from glob import glob
from setuptools import setup


setup(
    name='base26',
    version='0.1.0',
    description='Base 26 arbitrary precision expression calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
        ],
    },
    packages=['base26'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    scripts=glob('bin/*'),
    license='ISC',
)
