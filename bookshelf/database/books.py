class Book(object):
    def __init__(self, id, name, author_id):
        self.id = id
        self.name = name
        self.author_id = author_id

    def __repr__(self):
        return "Book(id={!r}, name={!r}, author_id={!r})".format(self.id, self.name, self.author_id)
