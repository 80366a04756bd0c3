## convexsect drawable that renders to DXF files using the ezdxf
## package.
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

from pathlib import Path

import convexsect.drawable as drawable
import ezdxf

## scene layers and their default AutoCAD colors
SCENE_LAYERS = {
    'SHAPES': 7,  # black/white
    'ANCHORS': 8, # gray
}

## class to render classified scenes as DXF drawings
class ezdxfDraw(drawable.Drawable):

    def __init__(self,filename="convexsect-out"):
        super().__init__()

        # setup=False leaves out the default blocks and styles, which a
        # plain line drawing has no use for
        self.__doc = ezdxf.new(dxfversion='R2010', setup=False)
        self.__doc.header['$INSUNITS'] = 0 # unitless scene coordinates
        for name, color in SCENE_LAYERS.items():
            self.__doc.layers.new(name, dxfattribs={'color': color})
        self.__msp = self.__doc.modelspace()
        self.filename = filename
        self.layerlist = [False, '0'] + list(SCENE_LAYERS)

    def __repr__(self):
        return 'ezdxfDraw(filename={!r})'.format(self.filename)

    @property
    def doc(self):
        return self.__doc

    @property
    def filename(self):
        return self.__filename

    ## the name is stored without the .dxf suffix, which display() adds
    @filename.setter
    def filename(self,name):
        if isinstance(name,Path):
            name = str(name)
        if not isinstance(name,str) or not name:
            raise ValueError('bad filename: '+str(name))
        if name.lower().endswith('.dxf'):
            name = name[:-4]
        self.__filename = name

    @property
    def path(self):
        return Path('{}.dxf'.format(self.filename))

    ## current pen as DXF entity attributes: layer '0' and color
    ## BYLAYER (256) when unset
    def _pen(self):
        layer = self.layer if self.layer else '0'
        if self.linecolor is False:
            color = 256
        else:
            color = self.thing2color(self.linecolor,'i')
        return {'layer': layer, 'color': color}

    ## Overload virtual convexsect.drawable base class drawing methods

    def draw_line(self,p1,p2):
        self.__msp.add_line((p1[0],p1[1]),(p2[0],p2[1]),dxfattribs=self._pen())

    def draw_arc(self,p,r,start,end):
        if start == 0 and end == 360:
            self.__msp.add_circle((p[0],p[1]),r,dxfattribs=self._pen())
        else:
            self.__msp.add_arc((p[0],p[1]),r,start,end,dxfattribs=self._pen())

    def display(self):
        self.__doc.saveas(str(self.path))
        return self.path
