"""
ydt - Youdao Dictionary Translation

A small tool that looks a word up on the Youdao result page and prints
its phonetics and translations as plain text.
"""

__version__ = "0.2.0"
__author__ = "ydt Contributors"
__url__ = "https://github.com/yushengyangchem/ydt"
