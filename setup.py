from setuptools import find_packages, setup

package_name = 'mission_path'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test', 'test.*']),
    python_requires='>=3.9',
    install_requires=[
        'setuptools',
        'numpy',
    ],
    zip_safe=True,
    maintainer='david-ross',
    maintainer_email='ross.d2@northeastern.edu',
    description='Path calculation engine for differential-drive mission programs',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
