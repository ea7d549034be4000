from collections import defaultdict

__all__ = ["TreeBuilderRegistry"]


class TreeBuilderRegistry:
    """A way of looking up TreeBuilder subclasses by their name or by desired
    features.
    """

    def __init__(self):
        self.builders_for_feature = defaultdict(list)
        self.builders = []

    def register(self, treebuilder_class):
        """Register a treebuilder based on its advertised features.

        Later registrations take precedence over earlier ones.

        :param treebuilder_class: A subclass of TreeBuilder. Its .features
           attribute should list its features.
        """
        for feature in treebuilder_class.features:
            self.builders_for_feature[feature].insert(0, treebuilder_class)
        self.builders.insert(0, treebuilder_class)

    def lookup(self, *features):
        """Look up a TreeBuilder subclass with the desired features.

        :param features: A list of features to look for. If none are
            provided, the most recently registered TreeBuilder subclass
            will be used.
        :return: A TreeBuilder subclass, or None if there's no
            registered subclass with all the requested features.
        """
        if not self.builders:
            return None
        if not features:
            return self.builders[0]
        candidates = None
        for feature in features:
            having = self.builders_for_feature.get(feature, [])
            if not having:
                # Nobody has this feature at all.
                return None
            if candidates is None:
                candidates = list(having)
            else:
                candidates = [c for c in candidates if c in having]
        return candidates[0] if candidates else None
