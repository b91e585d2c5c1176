# ndm2sql/errors.py

class Ndm2SqlError(Exception):
    pass

class UsageError(Ndm2SqlError):
    pass

class ReadError(Ndm2SqlError):
    pass

class DecodeError(Ndm2SqlError):
    pass

class WriteError(Ndm2SqlError):
    pass
