from setuptools import setup, find_packages

setup(
    name='oz_solver',               # Package name
    version='0.1.0',                   # Version number
    description="Ornstein-Zernike integral equation solver for simple isotropic liquids.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[                 # Dependencies your package needs
        'numpy',
        'scipy',
        'pyFFTW',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.10',           # Minimum Python version
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
