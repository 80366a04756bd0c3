## base class of drawable for convexsect
## Copyright (c) 2022 convexsect contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from convexsect.geom import *
from convexsect.poly import ispoly, iscircle

## Generic drawing functions -- assumed to use the current drawing
## pen (color, layer)

class Drawable:
    """Base class for convexsect drawables"""

    ## pure virtual functions -- override for specific rendering
    ## system

    def draw_arc(self,p,r,start,end):
        raise NotImplementedError('draw_arc not implemented for {}'.format(self.__class__.__name__))

    def draw_line(self,p1,p2):
        raise NotImplementedError('draw_line not implemented for {}'.format(self.__class__.__name__))

    ## non-virtual utility drawing functions
    def draw_circle(self,p,r):
        self.draw_arc(p,r,0,360)

    ## anchors are drawn as small circles, as in the browser demos
    def draw_point(self,p):
        self.draw_circle(p,self.pointsize)

    def draw_poly(self,a):
        n = len(a)
        for i in range(n):
            self.draw_line(a[i],a[(i+1) % n])

    def __init__(self):
        self.__pointsize = 5.0
        self.__linecolor = False
        self.__layer = False
        self.__layerlist = [ False, 'default' ]

    ## Various property functions

    @property
    def layerlist(self):
        return self.__layerlist

    def _set_layerlist(self,lst):
        self.__layerlist = lst

    @layerlist.setter
    def layerlist(self,lst):
        if isinstance(lst,list):
            self._set_layerlist(lst)
        else:
            raise ValueError('bad layer list ' + str(lst))

    @property
    def layer(self):
        return self.__layer

    def _set_layer(self,lyr):
        self.__layer = lyr

    @layer.setter
    def layer(self,lyr=False):
        if lyr in self.layerlist:
            self._set_layer(lyr)
        else:
            raise ValueError('bad layer: ' + str(lyr))

    @property
    def pointsize(self):
        return self.__pointsize

    @pointsize.setter
    def pointsize(self,ps):
        if not isgoodnum(ps):
            raise ValueError('invalid pointsize ' + str(ps))
        if ps < epsilon:
            ps = epsilon
        self.__pointsize = ps

    ## color can be set as an AutoCAD index color, a color name from
    ## colordict, or False for "by layer"
    def _checkcolor(self,c):
        if isinstance(c,bool):
            return c == False
        if isinstance(c,int):
            return 0 <= c < 256
        return isinstance(c,str) and c.lower() in self.colordict

    @property
    def linecolor(self):
        return self.__linecolor

    @linecolor.setter
    def linecolor(self,c=False):
        if self._checkcolor(c):
            self.__linecolor = c
        else:
            raise ValueError('bad linecolor ' + str(c))

    def __repr__(self):
        return 'an abstract Drawable instance'

    def draw(self,x):
        if ispoint(x):
            self.draw_point(x)
        elif iscircle(x):
            self.draw_circle(x[0],x[1])
        elif ispoly(x):
            self.draw_poly(x)
        elif isinstance(x,list):
            for e in x:
                self.draw(e)
        else:
            raise ValueError(f'bad argument to Drawable.draw(): {x}')

    ## draw each shape of a scene in its classification color, outlines
    ## on the SHAPES layer and anchors on the ANCHORS layer when the
    ## backend provides them
    def draw_scene(self,scene):
        for shape in scene.shapes:
            self.linecolor = shape.color
            if 'SHAPES' in self.layerlist:
                self.layer = 'SHAPES'
            if shape.poly is None:
                self.draw_circle(shape.center,shape.radius)
            else:
                self.draw_poly(shape.poly)
            if 'ANCHORS' in self.layerlist:
                self.layer = 'ANCHORS'
            for a in shape.anchors:
                self.draw_point(a)

    ## cause drawing page to be rendered -- pure virtual in base class
    def display(self):
        raise NotImplementedError('display not implemented for {}'.format(self.__class__.__name__))

    ## named colors used by the demos, with their RGB values and
    ## AutoCAD color indices
    colordict = {
        'black': ([0, 0, 0], 7),
        'red': ([255, 0, 0], 1),
        'yellow': ([255, 255, 0], 2),
        'green': ([0, 255, 0], 3),
        'aqua': ([0, 255, 255], 4),
        'blue': ([0, 0, 255], 5),
        'magenta': ([255, 0, 255], 6),
        'white': ([255, 255, 255], 7),
        'gray': ([128, 128, 128], 8),
        'silver': ([192, 192, 192], 9),
        'brown': ([165, 42, 42], 14),
        'antiquewhite': ([250, 235, 215], 51),
    }

    ## convert a color name or index to an AutoCAD color index
    ## ('i') or an RGB byte triple ('b')
    def thing2color(self,thing,convert='i'):
        if convert not in ['i','b']:
            raise ValueError('bad color conversion: {}'.format(convert))
        if isinstance(thing,str):
            key = thing.lower()
            if key not in self.colordict:
                raise ValueError('bad color name passed to thing2color: {}'.format(thing))
            rgb, idx = self.colordict[key]
            return idx if convert == 'i' else list(rgb)
        elif isinstance(thing,int) and not isinstance(thing,bool):
            if convert == 'i':
                return thing
            for rgb, idx in self.colordict.values():
                if idx == thing:
                    return list(rgb)
            raise ValueError('no RGB value known for color index: {}'.format(thing))
        raise ValueError('bad thing passed to thing2color: {}'.format(thing))
