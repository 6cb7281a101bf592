from src_doit import *  # NOQA
