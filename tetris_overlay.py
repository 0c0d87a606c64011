
import pygame

class Overlay:
    """Modal notice (game over) that stays up until acknowledged."""
    ACK_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE, pygame.K_ESCAPE)

    def __init__(self):
        self.active=False
        self.title=""
        self.detail=""

    def show(self,title,detail=""):
        self.active=True; self.title=title; self.detail=detail

    def dismiss(self): self.active=False

    def handle(self,e):
        """Return True once the notice has been acknowledged."""
        if not self.active: return False
        if e.type==pygame.KEYDOWN and e.key in self.ACK_KEYS:
            self.dismiss(); return True
        return False

    def draw(self,screen,font,big_font,w,h):
        if not self.active: return
        s=pygame.Surface((w-80,h-80),pygame.SRCALPHA); s.fill((20,25,40,230))
        screen.blit(s,(40,40))
        title=big_font.render(self.title,True,(255,220,220))
        screen.blit(title,title.get_rect(center=(w//2,h//2-30)))
        y=h//2+10
        for line in (self.detail,"Press Enter to continue"):
            if not line: continue
            txt=font.render(line,True,(200,210,235))
            screen.blit(txt,txt.get_rect(center=(w//2,y))); y+=26
