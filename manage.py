#!/usr/bin/env python
from oxford_skill.manage import manage


if __name__ == '__main__':
    manage()
