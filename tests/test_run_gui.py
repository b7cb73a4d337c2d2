from shapeshift.run_gui import fit_container_height


class FakeContainer:
    def __init__(self):
        self.minimum_heights = []

    def setMinimumHeight(self, height):
        self.minimum_heights.append(height)


class FakeLayout:
    def __init__(self, total_height):
        self.total_height = total_height


def test_fit_container_height_follows_each_pass():
    container = FakeContainer()
    on_layout = fit_container_height(container)

    on_layout(FakeLayout(480))
    on_layout(FakeLayout(210.5))

    assert container.minimum_heights == [480, 211]
