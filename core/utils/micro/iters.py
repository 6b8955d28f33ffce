from typing import Any, Iterable

class Iters:

    def flatten ( self, items: Iterable, deep: bool = True ):

        if isinstance(items, dict): items = items.values()
        result = []

        for a in items:

            if isinstance(a, dict):
                vals = a.values()

                if deep: result.extend(self.flatten(vals))
                else: result.extend(vals)

            elif isinstance(a, (list, tuple, set)):
                if deep: result.extend(self.flatten(a))
                else: result.extend(a)

            else: result.append(a)

        return result

    def unique ( self, items: Iterable ):

        seen, result = set(), []

        for x in self.flatten(items):

            if isinstance(x, (list, dict, set, tuple)): continue

            if x not in seen:
                seen.add(x)
                result.append(x)

        return result

    def ensure ( self, value: Any ):

        if value is None: return []
        if isinstance(value, (list, tuple, set)): return list(value)

        return [value]
