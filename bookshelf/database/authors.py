class Author(object):
    def __init__(self, id, name):
        self.id = id
        self.name = name

    def __repr__(self):
        return "Author(id={!r}, name={!r})".format(self.id, self.name)
