# bidict.py
#
# Bidirectional one-to-one map
"""
A BiDict stores pairs (one, two) where every `one` is unique among
all pairs and every `two` is unique among all pairs. Both directions
are indexed so lookups work from either side.

The forward index maps one -> two, the backward index maps two -> one.
Every mutation updates both indexes or neither of them; a caller
never sees one index changed without the other.
"""
from types import MappingProxyType
from typing import Hashable
import logging

__docformat__ = 'epytext en'

logger = logging.getLogger('pybimap')

_MISSING = object()


class BiDictError(Exception):
    """Base class for all BiDict errors."""


class DuplicateValueError(BiDictError, ValueError):
    """A value would end up shared by two pairs.

    :ivar value: the value that is already bound
    :ivar   key: the key it is bound to, if known
    """

    def __init__(self, value, key=_MISSING):
        super().__init__(value)
        self.value = value
        self.key = None if key is _MISSING else key
        self._has_key = key is not _MISSING

    def __str__(self):
        if self._has_key:
            return 'value %r is already bound to key %r' % (self.value, self.key)
        return 'duplicate value %r' % (self.value,)


class DuplicateKeyError(BiDictError, ValueError):
    """A key would end up shared by two pairs.

    :ivar key: the key that is already bound
    """

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return 'duplicate key %r' % (self.key,)


class KeyNotFoundError(BiDictError, KeyError):
    """Lookup or assignment addressed a key or value that is not stored."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return '%r not found' % (self.key,)


class ConsistencyError(BiDictError):
    """The forward and backward index disagree about a pair.

    This can only happen if the internal indexes were modified behind
    the back of BiDict and means the instance can no longer be trusted.
    """

    def __init__(self, one, two):
        super().__init__(one, two)
        self.one = one
        self.two = two

    def __str__(self):
        return 'indexes disagree about pair (%r, %r)' % (self.one, self.two)


def _check(item, side):
    if item is None:
        raise TypeError('%s must not be None' % side)


def _same(a, b):
    # dict key matching, so values like nan still match themselves
    return a is b or a == b


class BiDict:
    """Bidirectional one-to-one map.

    Iterating a BiDict yields (one, two) tuples in insertion order.
    Two BiDicts are equal when they hold the same pairs, regardless of
    the order in which the pairs were added.

    :ivar  forward: read-only view of the one -> two index
    :type  forward: types.MappingProxyType
    :ivar backward: read-only view of the two -> one index
    :type backward: types.MappingProxyType
    """

    def __init__(self, mapping=None):
        """Constructor.

        :param mapping: optional initial association, anything with an
                        items() method. Its values must be unique.
        :type  mapping: mapping
        :raise DuplicateValueError: two keys of mapping share a value
        """
        self._forward = {}
        self._backward = {}
        self.forward = MappingProxyType(self._forward)
        self.backward = MappingProxyType(self._backward)
        if mapping is not None:
            self._load(mapping.items())

    @classmethod
    def from_pairs(cls, pairs):
        """Build a BiDict from an iterable of (one, two) tuples.

        :raise DuplicateKeyError:   a key occurs more than once
        :raise DuplicateValueError: a value occurs more than once
        """
        bidict = cls()
        bidict._load(pairs)
        return bidict

    def _load(self, pairs):
        # Validate into scratch indexes so a rejected source leaves us empty.
        forward = {}
        backward = {}
        for one, two in pairs:
            _check(one, 'key')
            _check(two, 'value')
            if one in forward:
                raise DuplicateKeyError(one)
            if two in backward:
                raise DuplicateValueError(two, backward[two])
            forward[one] = two
            backward[two] = one
        self._forward.update(forward)
        self._backward.update(backward)

    def copy(self):
        other = type(self)()
        other._forward.update(self._forward)
        other._backward.update(self._backward)
        return other

    def add(self, one: Hashable, two: Hashable) -> bool:
        """Add a pair unless either side is already bound.

        This is a nuclear operation: if `one` is already a key or `two`
        already a value nothing is changed.

        :return: True if the pair was added, False if it was rejected
        :rtype:  boolean
        """
        _check(one, 'key')
        _check(two, 'value')
        if one in self._forward or two in self._backward:
            logger.debug('Rejected pair (%r, %r): key or value already bound', one, two)
            return False
        self._forward[one] = two
        self._backward[two] = one
        return True

    def set_by_key(self, one: Hashable, two: Hashable):
        """Replace the value bound to an existing key.

        :raise KeyNotFoundError:    one is not a key
        :raise DuplicateValueError: two is bound to another key
        """
        _check(one, 'key')
        _check(two, 'value')
        if one not in self._forward:
            raise KeyNotFoundError(one)
        owner = self._backward.get(two, _MISSING)
        if owner is not _MISSING and not _same(owner, one):
            raise DuplicateValueError(two, owner)
        del self._backward[self._forward[one]]
        self._forward[one] = two
        self._backward[two] = one

    def set_by_value(self, two: Hashable, one: Hashable):
        """Replace the key bound to an existing value.

        :raise KeyNotFoundError:  two is not a value
        :raise DuplicateKeyError: one is bound to another value
        """
        _check(two, 'value')
        _check(one, 'key')
        if two not in self._backward:
            raise KeyNotFoundError(two)
        owner = self._forward.get(one, _MISSING)
        if owner is not _MISSING and not _same(owner, two):
            raise DuplicateKeyError(one)
        del self._forward[self._backward[two]]
        self._backward[two] = one
        self._forward[one] = two

    def get_by_key(self, one: Hashable):
        _check(one, 'key')
        try:
            return self._forward[one]
        except KeyError:
            raise KeyNotFoundError(one) from None

    def get_by_value(self, two: Hashable):
        _check(two, 'value')
        try:
            return self._backward[two]
        except KeyError:
            raise KeyNotFoundError(two) from None

    def try_get_by_key(self, one: Hashable, default=None):
        _check(one, 'key')
        return self._forward.get(one, default)

    def try_get_by_value(self, two: Hashable, default=None):
        _check(two, 'value')
        return self._backward.get(two, default)

    def contains_key(self, one: Hashable) -> bool:
        _check(one, 'key')
        return one in self._forward

    def contains_value(self, two: Hashable) -> bool:
        _check(two, 'value')
        return two in self._backward

    def contains_pair(self, one: Hashable, two: Hashable) -> bool:
        """Check if `one` is stored and maps to `two`.

        A key that maps to some other value does not count.
        """
        _check(one, 'key')
        _check(two, 'value')
        stored = self._forward.get(one, _MISSING)
        return stored is not _MISSING and _same(stored, two)

    def _check_linked(self, one, two):
        back = self._backward.get(two, _MISSING)
        if back is _MISSING or not _same(back, one):
            logger.error('Index corruption: %r -> %r has no matching backward entry', one, two)
            raise ConsistencyError(one, two)

    def _check_linked_back(self, one, two):
        forward = self._forward.get(one, _MISSING)
        if forward is _MISSING or not _same(forward, two):
            logger.error('Index corruption: %r <- %r has no matching forward entry', one, two)
            raise ConsistencyError(one, two)

    def _unlink(self, one, two):
        del self._backward[two]
        del self._forward[one]

    def remove_by_key(self, one: Hashable) -> bool:
        """Remove the pair with key `one`.

        :return: True if a pair was removed, False if one is not a key
        :raise ConsistencyError: the backward index does not point back
        """
        _check(one, 'key')
        two = self._forward.get(one, _MISSING)
        if two is _MISSING:
            return False
        self._check_linked(one, two)
        self._unlink(one, two)
        return True

    def remove_by_value(self, two: Hashable) -> bool:
        """Remove the pair with value `two`.

        :return: True if a pair was removed, False if two is not a value
        :raise ConsistencyError: the forward index does not point back
        """
        _check(two, 'value')
        one = self._backward.get(two, _MISSING)
        if one is _MISSING:
            return False
        self._check_linked_back(one, two)
        self._unlink(one, two)
        return True

    def remove_pair(self, one: Hashable, two: Hashable) -> bool:
        """Remove the pair (one, two) only if exactly that pair is stored."""
        if not self.contains_pair(one, two):
            return False
        self._check_linked(one, two)
        self._unlink(one, two)
        return True

    def clear(self):
        self._forward.clear()
        self._backward.clear()

    def keys(self):
        return self._forward.keys()

    def values(self):
        return self._forward.values()

    def items(self):
        return self._forward.items()

    def __len__(self) -> int:
        return len(self._forward)

    def __iter__(self):
        return iter(self._forward.items())

    def __contains__(self, pair) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self.contains_pair(*pair)

    def __getitem__(self, key: Hashable):
        return self.get_by_key(key)

    def __setitem__(self, key: Hashable, value: Hashable):
        self.set_by_key(key, value)

    def __delitem__(self, key: Hashable):
        # keys take precedence over values when an item is on both sides
        if self.remove_by_key(key):
            return
        if not self.remove_by_value(key):
            raise KeyNotFoundError(key)

    def __eq__(self, other):
        if not isinstance(other, BiDict):
            return NotImplemented
        return len(self) == len(other) and self._forward == other._forward

    __hash__ = None

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._forward)
