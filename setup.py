from setuptools import find_packages, setup

package_dir = {"": "code"}

setup(
    name='roomnav',
    version='0.1.0',
    package_dir=package_dir,
    packages=find_packages(where="code", include=["roomnav", "roomnav.*"]),
    package_data={'roomnav.cfg': ['default.yaml']},
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'pandas',
        'matplotlib',
        'igraph',
        'pyyaml',
        'tqdm'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': ['roomnav=roomnav.cli:main']
    }
)
