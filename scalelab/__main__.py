#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/__main__.py

from scalelab.main import main

main()
