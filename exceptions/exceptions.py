class ErrorBookCreation(Exception):
    pass


class ErrorBookRead(Exception):
    pass
