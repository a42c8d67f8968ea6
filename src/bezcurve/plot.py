"""
Renderers for the RenderPlan. Matplotlib or plotly library is used as backend.

Usage:
    plotting = Plotting(PlottingMatplot())
    plotting.draw(curve.evaluate())
    plotting.show()
"""
import numpy as np

import plotly.offline as pl
import plotly.graph_objs as go

import matplotlib.pyplot as plt

from .render_plan import Circle, Polyline, RenderPlan


class PlottingPlotly:
    def __init__(self, filename_base='bezier_plot'):
        self.filename_base = filename_base
        self.i_figure = -1
        self._reinit()

    def _reinit(self):
        self.i_figure += 1
        self.data = []

    def add_polyline(self, X, Y, color, line_width, name=None):
        self.data.append(go.Scatter(x=X, y=Y, mode='lines', name=name,
                                    line=dict(color=color, width=line_width)))

    def add_circles(self, X, Y, radii, color):
        # plotly marker size is a diameter in pixels
        marker = dict(size=2 * np.asarray(radii), color=color)
        self.data.append(go.Scatter(x=X, y=Y, mode='markers', marker=marker, name='control_points'))

    def figure(self):
        fig = go.Figure(data=self.data)
        fig.update_yaxes(scaleanchor="x", scaleratio=1)
        return fig

    def show(self, auto_open=True):
        """
        Write added plots to a HTML file and clear the list for other plotting.
        :return: name of the written file or None if nothing was plotted.
        """
        filename = None
        if self.data:
            filename = '%s_%d.html' % (self.filename_base, self.i_figure)
            pl.plot(self.figure(), filename=filename, auto_open=auto_open)
        self._reinit()
        return filename


class PlottingMatplot:
    def __init__(self):
        self.fig, self.ax = plt.subplots()
        self.ax.set_aspect('equal')

    def add_polyline(self, X, Y, color, line_width, name=None):
        self.ax.plot(X, Y, color=color, linewidth=line_width, solid_capstyle='round', label=name)

    def add_circles(self, X, Y, radii, color):
        for x, y, r in zip(X, Y, radii):
            self.ax.add_patch(plt.Circle((x, y), r, color=color))

    def figure(self):
        return self.fig

    def show(self):
        plt.show()


class Plotting:
    """
    Draws the instructions of a RenderPlan on a backend.
    Several plans can be added and finally displayed on common figure calling self.show().
    """
    def __init__(self, backend=None):
        if backend is None:
            backend = PlottingPlotly()
        self.backend = backend

    def draw_polyline(self, polyline: Polyline):
        if len(polyline.points) == 0:
            return
        X, Y = polyline.to_array().T
        self.backend.add_polyline(X, Y, polyline.style.color, polyline.style.line_width, name=polyline.name)

    def draw_circles(self, circles):
        """
        Circles of the same color are passed to the backend at once.
        """
        by_color = {}
        for c in circles:
            by_color.setdefault(c.color, []).append(c)
        for color, group in by_color.items():
            X = [c.center.x for c in group]
            Y = [c.center.y for c in group]
            radii = [c.radius for c in group]
            self.backend.add_circles(X, Y, radii, color)

    def draw(self, plan: RenderPlan):
        """
        Add all instructions of the plan in the draw order.
        """
        circles = []
        for item in plan.instructions():
            if isinstance(item, Circle):
                circles.append(item)
            else:
                self.draw_polyline(item)
        self.draw_circles(circles)

    def show(self, *args, **kwargs):
        """
        Display added plots. Empty the queue.
        """
        return self.backend.show(*args, **kwargs)
