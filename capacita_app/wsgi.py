# capacita_app/wsgi.py
# -*- coding: utf-8 -*-
from capacita_app import create_app

app = create_app()
