from setuptools import setup, find_packages


setup(name='rotconv',
      version='1.0.0',
      description='Conversions between axis-angle, Euler angle, quaternion, and rotation matrix representations',
      packages=find_packages(include=['rotconv', 'rotconv.*']),
      python_requires='>=3.11',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['convert_rotation=rotconv.scripts.convert_rotation:main']})
