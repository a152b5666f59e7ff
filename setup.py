from setuptools import setup

setup(
    name='tamlang',
    version='0.1.0',
    description='Scanner and syntax/declaration checker for the tam teaching language',
    author='tamlang contributors',
    package_dir={'tamlang': 'src/tamlang'},
    packages=['tamlang', 'tamlang.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'tamc = tamlang.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
