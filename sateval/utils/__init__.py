#!/usr/bin/env python
# -*- coding: utf-8 -*-
# flake8: noqa

from .timed_context import timed_context
