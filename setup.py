from setuptools import setup
import yangrender

setup(name='yangrender',
      version=yangrender.__version__,
      description="Render YANG schemas as trees, YANG, JSON, HTML and "
      "dependency lists",
      long_description="Renders YANG (RFC 6020/7950) modules, validated with"
      " pyang, in several output formats. Provides a framework for plugins"
      " that add output formats.",
      install_requires=["pyang"],
      extras_require={
          'test': ["pytest"],
      },
      python_requires='>=3.10',
      license='BSD',
      classifiers=[
            'Development Status :: 4 - Beta',
            'License :: OSI Approved :: BSD License',
            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: 3.10',
            'Programming Language :: Python :: 3.11',
            'Programming Language :: Python :: 3.12',
            ],
      keywords='YANG renderer',
      entry_points={
          'console_scripts': [
              'yangrender = yangrender.main:run',
          ]
      },
      packages=['yangrender', 'yangrender.plugins'],
      )
