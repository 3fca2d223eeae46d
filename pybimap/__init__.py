"""Python bidirectional map.

pybimap provides BiDict, a one-to-one map between two sets of
hashable values that can be queried from either side. Both sides are
indexed, so looking up a key by its value is as cheap as looking up a
value by its key.

Here is an example::

  from pybimap import BiDict

  codes = BiDict({1: "one", 2: "two"})
  codes.add(3, "three")

  print(codes.get_by_key(3))        # "three"
  print(codes.get_by_value("one"))  # 1

  codes.add(3, "drei")             # rejected, 3 is already bound
  codes.set_by_key(3, "drei")      # replaces "three"

  for key, value in codes:
      print("%s: %s" % (key, value))


This package contains one module:

  - bidict: the BiDict class and its exceptions
"""

from pybimap.bidict import BiDict
from pybimap.bidict import BiDictError
from pybimap.bidict import ConsistencyError
from pybimap.bidict import DuplicateKeyError
from pybimap.bidict import DuplicateValueError
from pybimap.bidict import KeyNotFoundError

__docformat__ = 'epytext en'

__author__ = 'pybimap developers'
__copyright__ = 'Copyright 2026 pybimap developers. All rights reserved.'
__version__ = '1.0'

__all__ = ['bidict', 'BiDict', 'BiDictError', 'ConsistencyError',
           'DuplicateKeyError', 'DuplicateValueError', 'KeyNotFoundError']
