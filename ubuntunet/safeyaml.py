# This file is part of ubuntunet. See LICENSE file for license information.

import collections.abc

import yaml

YAMLError = yaml.YAMLError


class _UniqueKeySafeLoader(yaml.SafeLoader):
    """Safe loader refusing mappings which repeat a key."""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, collections.abc.Hashable):
                # reported by SafeLoader itself
                continue
            if key in seen:
                raise yaml.constructor.ConstructorError(
                    None,
                    None,
                    "found duplicate key %r" % (key,),
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def load(blob):
    return yaml.load(blob, Loader=_UniqueKeySafeLoader)
