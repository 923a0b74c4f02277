from glob import glob
from setuptools import setup


setup(
    name='clacky',
    version='0.1.0',
    description='Exact rational RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['clacky'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
