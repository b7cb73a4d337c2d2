class FakeElement:
    def __init__(self, width, height, name=None):
        self._width = width
        self._height = height
        self.name = name

    def width(self):
        return self._width

    def height(self):
        return self._height


class FakeGeometry:
    def __init__(self, container_width, elements):
        self.container_width = container_width
        self.elements = list(elements)
        self.width_measurements = 0

    def children(self, container):
        del container
        return list(self.elements)

    def measure_container_width(self, container):
        del container
        self.width_measurements += 1
        return self.container_width

    def measure_item_width(self, element):
        return element.width()

    def measure_item_height(self, element):
        return element.height()


class FakeSink:
    def __init__(self):
        self.calls = []

    def place(self, element, x, y):
        self.calls.append((element, x, y))


class FakeNotifier:
    def __init__(self):
        self.container = None
        self.callback = None
        self.unsubscribe_calls = 0

    def subscribe(self, container, callback):
        self.container = container
        self.callback = callback

    def unsubscribe(self):
        self.unsubscribe_calls += 1
        self.container = None
        self.callback = None

    def fire(self):
        if self.callback is not None:
            self.callback()


def make_elements(heights, width=100):
    return [FakeElement(width, height, name=f"item{n}") for n, height in enumerate(heights)]
