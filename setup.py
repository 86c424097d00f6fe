from setuptools import setup, find_packages

setup(
    name='flyview',
    version='0.1.0',
    author='nassimberrada',
    description='A free-flying camera viewer for 3D models with real-time ModernGL rendering.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'examples']),
    include_package_data=True,
    package_data={'flyview': ['glsl/*.glsl']},
    install_requires=[
        'numpy',
        'moderngl',
        'glfw',
        'trimesh',
        'Pillow',
        'watchdog',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'flyview=flyview.__main__:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics :: 3D Rendering',
        'Topic :: Scientific/Engineering :: Visualization',
    ],
    python_requires='>=3.8',
)
