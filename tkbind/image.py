import base64

from .element import Element
from .script import Command

class ImagePosition:
  '''values of -compound: where the image goes relative to the text'''
  bottom = "bottom"
  center = "center"
  image = "image" # image only
  left = "left"
  none = "none"
  right = "right"
  text = "text" # text only
  top = "top"

class ImageFormat:
  png = "png"
  gif = "gif"

class Image(Element):
  '''a Tk photo image, decoding is done by Tk itself'''
  kind = "image"
  format = None
  def __init__(self, file=None, data=None, interp=None):
    super().__init__(None, interp)
    self._file = None
    self._data = None
    self.tk.execute(Command("image", "create", "photo", self.id).configure(format=self.format))
    if file != None: self.setFile(file)
    if data != None: self.setBase64Data(data)
  def _makeId(self): return "image-%s" %self.hash
  @property
  def isAttached(self): return True

  def setFile(self, path:str):
    self._file = str(path)
    self.tk.execute(Command(self.id, "configure").option("file", self._file))
    return self
  def getFile(self): return self._file
  def setBase64Data(self, data):
    '''[data] is base64 text, or raw bytes which get encoded'''
    self._data = base64.b64encode(data).decode("ascii") if isinstance(data, bytes) else data
    self.tk.execute(Command(self.id, "configure").option("data", self._data))
    return self
  def getBase64Data(self): return self._data

  def getWidth(self) -> int:
    self.tk.execute(Command("image", "width", self.id))
    return self.tk.getResult(int)
  def getHeight(self) -> int:
    self.tk.execute(Command("image", "height", self.id))
    return self.tk.getResult(int)
  def destroy(self):
    self.tk.execute(Command("image", "delete", self.id))

class Png(Image):
  format = ImageFormat.png
class Gif(Image):
  format = ImageFormat.gif
