import os

DEBUG = os.environ.get('FIBHEAP_DEBUG', '').lower() not in ('', '0', 'false',
                                                             'no')


def set_debug(flag: bool = True) -> None:
    """
    Enable or disable membership checks.

    When enabled, inserting a node that is still linked into some list
    fails an assertion instead of silently corrupting both lists.
    """
    global DEBUG
    DEBUG = bool(flag)
