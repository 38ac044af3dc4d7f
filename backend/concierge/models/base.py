class FillableMixin:
    """
    Mass assignment for models whose attributes need normalizing.

    Keys listed in ``fillable_setters`` are routed through the named setter
    method instead of being assigned directly. Unknown keys raise TypeError,
    the same way SQLAlchemy's default constructor does.
    """

    fillable_setters = {}

    def __init__(self, **kwargs):
        super().__init__()
        self.fill(**kwargs)

    def fill(self, **attributes):
        cls = type(self)
        for key, value in attributes.items():
            setter = self.fillable_setters.get(key)
            if setter:
                getattr(self, setter)(value)
            elif hasattr(cls, key):
                setattr(self, key, value)
            else:
                raise TypeError(f"{key!r} is an invalid keyword argument for {cls.__name__}")
        return self
